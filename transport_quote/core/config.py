from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_NAME: str = "Transport Request Quote Service"
    TRANSPORT_REQUEST_API_URL: str = "http://localhost:5000/api/company/transport-requests"
    TRANSPORT_REQUEST_API_TOKEN: str = ""
    SUBMISSION_TIMEOUT_SECONDS: float = 10.0
    NOTIFICATION_WEBHOOK_URL: str = ""
    # Seconds the client keeps the success screen before resetting the form
    FORM_RESET_DELAY_SECONDS: int = 3
    LOG_DIR: str = "logs"

    class Config:
        env_file = ".env"

settings = Settings()
