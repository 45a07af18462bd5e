from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # "emailjs" routes through the REST API, anything else through SMTP
    mail_provider: str = "smtp"

    # CI runs send through a disposable Ethereal account
    ci: bool = False

    # SMTP
    smtp_host: str = "localhost"
    smtp_port: int = 587
    smtp_user: str = ""
    smtp_pass: str = ""
    smtp_from: str = ""

    # EmailJS REST API
    emailjs_api_url: str = "https://api.emailjs.com/api/v1.0/email/send"
    emailjs_service_id: str = ""
    emailjs_template_id: str = ""
    emailjs_public_key: str = ""
    emailjs_private_key: str = ""

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
