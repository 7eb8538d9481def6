"""Configuration for iris-monitor."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="IRIS_MONITOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    service_name: str = "iris-monitor"
    esp32_data_url: str = "http://172.20.10.5/data"
    esp32_timeout_sec: float = 2.0
    telemetry_source: str = "esp32"
    mock_delay_sec: float = 1.0
    telemetry_interval_sec: float = 1.0
    history_enabled: bool = False
    history_path: str = "bdd/readings_history.jsonl"


settings = Settings()
