from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Handfat ROI-kalkylator"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    # Display / report
    CURRENCY_SUFFIX: str = "kr"
    REPORT_TITLE: str = "ROI-kalkyl: Handfat"
    REPORT_FOOTER: str = "Handfat ROI-kalkylator"
    REPORT_DISCLAIMER: str = (
        "Denna kalkyl är avsedd som beslutsunderlag. "
        "För kliniska beslut krävs lokala data och uppföljning."
    )

    class Config:
        env_file = ".env"


settings = Settings()
