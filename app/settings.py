from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Memo App"
    app_version: str = "0.1.0"
    db_path: str = "data/memos.db"
    preserve_old_db: bool = False
    log_level: str = "INFO"
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
