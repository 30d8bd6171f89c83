"""
Artifact Store
Resolves contract identifiers to compiled Hardhat artifacts (ABI + bytecode)
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union

from loguru import logger

from .exceptions import ArtifactError


@dataclass(frozen=True)
class ContractArtifact:
    """Compiled contract as produced by `npx hardhat compile`"""
    name: str
    abi: List[Dict]
    bytecode: str
    source_name: Optional[str] = None


class ArtifactStore:
    """
    Looks up artifacts under a Hardhat artifacts directory

    Layout: <root>/contracts/<Source>.sol/<Name>.json (plus <Name>.dbg.json,
    which is ignored). Names may be bare ("Node") or fully qualified
    ("contracts/Node.sol:Node").
    """

    def __init__(self, root: Union[str, Path] = "artifacts"):
        """
        Initialize Artifact Store

        Args:
            root: Hardhat artifacts directory
        """
        self.root = Path(root)
        self._cache: Dict[str, ContractArtifact] = {}

    def load(self, name: str) -> ContractArtifact:
        """
        Load a contract artifact by name

        Args:
            name: Bare or fully-qualified contract name

        Returns:
            ContractArtifact with a deployable bytecode
        """
        if name in self._cache:
            return self._cache[name]

        path = self._find(name)
        artifact = self._read(name, path)

        self._cache[name] = artifact
        logger.debug(f"Loaded artifact {name} from {path}")
        return artifact

    def _find(self, name: str) -> Path:
        if ":" in name:
            source, contract = name.rsplit(":", 1)
            path = self.root / source / f"{contract}.json"
            if not path.is_file():
                raise ArtifactError(
                    f"Artifact for {name} not found at {path}. Run 'npx hardhat compile' first"
                )
            return path

        matches = sorted(
            p for p in self.root.glob(f"contracts/**/{name}.json")
            if not p.name.endswith(".dbg.json")
        )

        if not matches:
            raise ArtifactError(
                f"Artifact for {name} not found under {self.root / 'contracts'}. "
                "Run 'npx hardhat compile' first"
            )
        if len(matches) > 1:
            sources = ", ".join(str(p.parent.relative_to(self.root)) for p in matches)
            raise ArtifactError(
                f"Multiple artifacts named {name} ({sources}); use the fully qualified name, "
                f"e.g. 'contracts/{name}.sol:{name}'"
            )
        return matches[0]

    def _read(self, name: str, path: Path) -> ContractArtifact:
        try:
            with open(path, 'r', encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ArtifactError(f"Artifact at {path} is not valid JSON") from e

        if not isinstance(data, dict):
            raise ArtifactError(f"Artifact at {path} is not a Hardhat artifact object")

        abi = data.get('abi')
        bytecode = data.get('bytecode')

        if not isinstance(abi, list) or not isinstance(bytecode, str):
            raise ArtifactError(f"Artifact at {path} is missing abi/bytecode")

        if bytecode in ("", "0x"):
            raise ArtifactError(f"{name} has no bytecode (abstract contract or interface?)")

        # Unlinked libraries leave __$...$__ placeholders in the bytecode
        if data.get('linkReferences') or "__$" in bytecode:
            raise ArtifactError(f"{name} references unlinked libraries and cannot be deployed as-is")

        return ContractArtifact(
            name=data.get('contractName') or name.rsplit(":", 1)[-1],
            abi=abi,
            bytecode=bytecode,
            source_name=data.get('sourceName'),
        )
