from .pixel_em import PixelEmState, ems_to_pixels, pixels_to_ems, sync_pixel_em
from .unit_conversion import TEMPERATURE, ConversionEngine, ConverterState
from .unit_tables import UNIT_TABLES, UnitDefinition, UnitTable

__all__ = [
    "ConversionEngine",
    "ConverterState",
    "PixelEmState",
    "TEMPERATURE",
    "UNIT_TABLES",
    "UnitDefinition",
    "UnitTable",
    "ems_to_pixels",
    "pixels_to_ems",
    "sync_pixel_em",
]
