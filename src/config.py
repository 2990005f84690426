from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "LOC_"}

    # App
    debug: bool = False
    log_level: str = "INFO"
    cors_allow_origins: list[str] = ["*"]

    # Schedule export file name (Content-Disposition)
    schedule_csv_filename: str = "amortization-schedule.csv"

    # CLI: schedule rows printed before --all
    preview_periods: int = 12


settings = Settings()
