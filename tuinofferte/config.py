from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "Tuinofferte calculatie"

    # Fallback instellingen, used when a request carries no company settings
    UURTARIEF_DEFAULT: float = 45.00
    MARGE_DEFAULT: float = 20.0
    BTW_DEFAULT: float = 21.0

    # Empty means the bundled tuinofferte/data/reference_data.json
    REFERENCE_DATA_PATH: str = ""

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
