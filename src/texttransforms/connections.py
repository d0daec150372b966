from importlib import resources
from functools import cache

class CharacterSetDataSource:
    @classmethod
    @cache
    def yaml_path(cls):
        """ Named character set definitions """
        return resources.files('texttransforms.data').joinpath('character_sets.yaml')
