from fastapi import Depends

from breedhub.config import Settings, get_settings
from breedhub.services.connectors import BreedSourceConnector, TheDogApiConnector


def get_breed_source(settings: Settings = Depends(get_settings)) -> BreedSourceConnector:
    return TheDogApiConnector.from_settings(settings)
