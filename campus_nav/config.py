from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings

DATA_DIR = Path(__file__).resolve().parent / "data"

class Settings(BaseSettings):
    # Campus reference points
    SGW_LAT: float = 45.4953534
    SGW_LNG: float = -73.578549
    LOYOLA_LAT: float = 45.4582
    LOYOLA_LNG: float = -73.6405

    # Geometry
    EARTH_RADIUS_KM: float = 6371.0
    SHUTTLE_RADIUS_KM: float = 0.5  # 500m around each campus
    UNKNOWN_DISTANCE_KM: float = 9999.0

    # Static building polygons
    BUILDINGS_FILE: Path = DATA_DIR / "buildings.json"

    # Shuttle map fallback center
    SHUTTLE_CENTER_LAT: float = 45.48469766613475
    SHUTTLE_CENTER_LNG: float = -73.6083984375

    # Service
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"

settings = Settings()
