from dataclasses import dataclass
from typing import Union

from .composer import Composer, DEFAULT_UNIT

@dataclass(frozen=True)
class Config:
    letters: Union[int, str]
    symbols: Union[int, str]
    numbers: Union[int, str]
    unit: Union[int, str]

    @classmethod
    def default(cls):
        return cls({})

    def __init__(self, dict_data):
        defaults = {
            "letters": 10,
            "symbols": 2,
            "numbers": 3,
            "unit": DEFAULT_UNIT,
        }
        # Keys missing from config.toml fall back to the defaults.
        for key, default_value in defaults.items():
            object.__setattr__(self, key, dict_data.get(key, default_value))

    def dict(self):
        return {
            "letters": self.letters,
            "symbols": self.symbols,
            "numbers": self.numbers,
            "unit": self.unit,
        }

    def composer(self, rng=None) -> Composer:
        """
        Returns a Composer with this configuration's composition. Values are
        validated here, so a broken config.toml surfaces as ComposerException.
        """
        return Composer(self.letters, self.symbols, self.numbers,
            unit=self.unit, rng=rng)
