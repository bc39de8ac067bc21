from dataclasses import dataclass
from pathlib import Path

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


@dataclass(frozen=True)
class IngestionConfig:
    """
    Configuration for the raw CSV to ``restaurants.json`` conversion.
    """

    raw_csv_path: Path = _DATA_DIR / "raw" / "restaurants.csv"
    processed_data_dir: Path = _DATA_DIR
    processed_filename: str = "restaurants.json"
    # Every restaurant is placed around this point
    home_latitude: float = 29.7604
    home_longitude: float = -95.3698
    coordinate_spread: float = 0.2
    seed: int = 42

    @property
    def processed_path(self) -> Path:
        return self.processed_data_dir / self.processed_filename


DEFAULT_INGESTION_CONFIG = IngestionConfig()
