from dataclasses import dataclass
import os

from dotenv import load_dotenv


load_dotenv()


@dataclass(frozen=True)
class Settings:
    app_name: str
    log_level: str
    output_dir: str
    report_prefix: str


def get_settings() -> Settings:
    return Settings(
        app_name=os.getenv("APP_NAME", "clientcheck"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        output_dir=os.getenv("OUTPUT_DIR", "."),
        report_prefix=os.getenv("REPORT_PREFIX", "erros"),
    )
