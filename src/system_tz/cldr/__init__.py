"""Build-time pipeline turning CLDR windowsZones.xml into the embedded zone table."""

from system_tz.cldr.emitter import TableEmitter
from system_tz.cldr.extractor import ExtractionResult, MappingExtractor
from system_tz.cldr.fetcher import DatasetFetcher

__all__ = ["DatasetFetcher", "ExtractionResult", "MappingExtractor", "TableEmitter"]
