import logging
import yaml
from functools import cached_property
from typing import Dict, List
from texttransforms.connections import CharacterSetDataSource

logger = logging.getLogger(__name__)

class CharacterSetData(CharacterSetDataSource):
    def __init__(self):
        with self.yaml_path().open('r', encoding='utf-8') as f:
            self.definitions: Dict[str, dict] = yaml.safe_load(f)
        logger.debug("Loaded %d character set definitions", len(self.definitions))

    @cached_property
    def names(self) -> List[str]:
        return sorted(self.definitions)

    def categories(self, name: str) -> List[str]:
        return self.definitions[name].get('categories', [])

    def characters(self, name: str) -> List[str]:
        return self.definitions[name].get('characters', [])
