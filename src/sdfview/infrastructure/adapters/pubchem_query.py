"""
Resolution of user-supplied identifiers into PubChem 3D SDF requests.

Only the request is built here; fetching it is left to the caller.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from urllib.parse import quote

BASE_URL = "https://pubchem.ncbi.nlm.nih.gov/rest/pug/compound"

# Names whose PubChem name lookup does not give a 3D record
ALIASES = MappingProxyType(
    {
        "ethanol": 702,
        "water": 962,
    }
)

_CID = re.compile(r"\d+", re.ASCII)


@dataclass(frozen=True)
class PubChemQuery:
    """A PubChem compound request, by CID or by name."""

    namespace: str
    value: str

    @classmethod
    def resolve(cls, identifier: str) -> "PubChemQuery":
        """
        Build the query for an identifier.

        Numeric identifiers are CIDs, known aliases map to fixed CIDs, and
        anything else is looked up by lower-cased name.

        Raises:
            ValueError: If identifier is blank
        """
        identifier = identifier.strip()
        if not identifier:
            raise ValueError("Identifier is empty")
        if _CID.fullmatch(identifier):
            return cls("cid", identifier)
        alias = ALIASES.get(identifier.lower())
        if alias is not None:
            return cls("cid", str(alias))
        return cls("name", identifier.lower())

    @property
    def url(self) -> str:
        return f"{BASE_URL}/{self.namespace}/{quote(self.value, safe='')}/SDF?record_type=3d"
