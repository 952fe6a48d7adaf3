"""
Feature map model for dependency nodes.

A feature map holds the extra morphological or semantic features of a node as
ordered string pairs, rendered in the usual ``key=value|key=value`` column form.
"""

from typing import Dict, Iterable, Optional, Tuple, Union

from ..constants import BLANK, DELIM_FEATS, DELIM_KEY_VALUE
from ..exceptions import ValidationError


class FeatureMap(Dict[str, str]):
    """
    Insertion-ordered mapping of feature names to values.

    Keys are unique; re-putting a key keeps its original position.
    """

    def __init__(self, features: Union[None, Dict[str, str], Iterable[Tuple[str, str]]] = None):
        super().__init__()
        if features:
            self.update(features)

    def put(self, key: str, value: str) -> Optional[str]:
        """
        Set a feature value.

        Returns:
            Optional[str]: The previous value, or None if the key was absent
        """
        previous = self.get(key)
        self[key] = value
        return previous

    def remove(self, key: str) -> Optional[str]:
        """
        Remove a feature.

        Returns:
            Optional[str]: The removed value, or None if the key was absent
        """
        return self.pop(key, None)

    def copy(self) -> "FeatureMap":
        return FeatureMap(self)

    @classmethod
    def from_string(cls, text: Optional[str]) -> "FeatureMap":
        """
        Parse the ``key=value|key=value`` form.

        A blank token or empty string gives an empty map.

        Raises:
            ValidationError: If an entry has no key/value delimiter or an empty key
        """
        feats = cls()
        if text is None or text in ("", BLANK):
            return feats

        for entry in text.split(DELIM_FEATS):
            key, sep, value = entry.partition(DELIM_KEY_VALUE)
            if not sep or not key:
                raise ValidationError(f"Invalid feature entry '{entry}' in '{text}'")
            feats[key] = value
        return feats

    def __str__(self) -> str:
        if not self:
            return BLANK
        return DELIM_FEATS.join(f"{key}{DELIM_KEY_VALUE}{value}" for key, value in self.items())
