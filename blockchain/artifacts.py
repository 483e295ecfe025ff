"""
Artifact Resolver
Loads compiled Hardhat artifacts (ABI + bytecode) by contract name
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional
from loguru import logger

from .exceptions import ArtifactNotFoundError


@dataclass
class ContractArtifact:
    """Compiled contract as produced by `npx hardhat compile`"""

    contract_name: str
    source_name: str
    abi: List[Dict]
    bytecode: str
    path: Optional[Path] = None
    link_references: Dict = field(default_factory=dict)

    @property
    def fully_qualified_name(self) -> str:
        return f"{self.source_name}:{self.contract_name}"

    @property
    def constructor_inputs(self) -> List[Dict]:
        """Constructor parameters from the ABI (empty when no constructor is declared)"""
        for entry in self.abi:
            if entry.get('type') == 'constructor':
                return entry.get('inputs', [])
        return []


class ArtifactResolver:
    """
    Resolves contract names to compiled artifacts

    Accepts either a bare name ("Casino2") or a fully qualified
    name ("contracts/Casino2.sol:Casino2").
    """

    def __init__(self, artifacts_dir: str = "artifacts"):
        """
        Initialize Artifact Resolver

        Args:
            artifacts_dir: Hardhat artifacts directory
        """
        self.artifacts_dir = Path(artifacts_dir)

    def resolve(self, contract_name: str) -> ContractArtifact:
        """
        Resolve a contract name to its artifact

        Args:
            contract_name: Bare or fully qualified contract name

        Returns:
            Deployable ContractArtifact
        """
        if not contract_name:
            raise ArtifactNotFoundError("Contract name must not be empty")

        if not self.artifacts_dir.is_dir():
            raise ArtifactNotFoundError(
                f"Artifacts directory not found: {self.artifacts_dir} "
                f"(run 'npx hardhat compile' first)"
            )

        source_name, _, name = contract_name.rpartition(':')
        candidates = self._find_candidates(name)

        if source_name:
            candidates = [
                path for path in candidates
                if path.parent.relative_to(self.artifacts_dir).as_posix() == source_name
            ]

        if not candidates:
            raise ArtifactNotFoundError(
                f"Artifact for contract \"{contract_name}\" not found in {self.artifacts_dir} "
                f"(run 'npx hardhat compile' first)"
            )

        if len(candidates) > 1:
            artifacts = [self._load(path) for path in candidates]
            names = ", ".join(sorted(a.fully_qualified_name for a in artifacts))
            raise ArtifactNotFoundError(
                f"There are multiple artifacts for contract \"{contract_name}\", "
                f"use one of these fully qualified names: {names}"
            )

        artifact = self._load(candidates[0])
        self._check_deployable(artifact)

        logger.debug(f"Resolved {contract_name} -> {artifact.path}")
        return artifact

    def _find_candidates(self, name: str) -> List[Path]:
        """Find artifact JSON files named after the contract"""
        candidates = []

        for path in self.artifacts_dir.rglob(f"{name}.json"):
            relative = path.relative_to(self.artifacts_dir)

            # Skip compiler build info
            if relative.parts[0] == 'build-info':
                continue

            candidates.append(path)

        return sorted(candidates)

    def _load(self, path: Path) -> ContractArtifact:
        """Parse an artifact file"""
        try:
            with open(path, 'r') as f:
                contract_json = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ArtifactNotFoundError(f"Unreadable artifact {path}: {e}") from e

        if 'abi' not in contract_json or 'bytecode' not in contract_json:
            raise ArtifactNotFoundError(f"Artifact {path} has no abi/bytecode")

        source_name = contract_json.get(
            'sourceName',
            path.parent.relative_to(self.artifacts_dir).as_posix()
        )

        return ContractArtifact(
            contract_name=contract_json.get('contractName', path.stem),
            source_name=source_name,
            abi=contract_json['abi'],
            bytecode=contract_json['bytecode'],
            path=path,
            link_references=contract_json.get('linkReferences') or {}
        )

    def _check_deployable(self, artifact: ContractArtifact):
        """Reject abstract contracts and unlinked bytecode"""
        if artifact.bytecode in ('', '0x'):
            raise ArtifactNotFoundError(
                f"Contract {artifact.fully_qualified_name} is abstract and can't be deployed"
            )

        if artifact.link_references:
            libraries = ", ".join(
                f"{source}:{library}"
                for source, libs in artifact.link_references.items()
                for library in libs
            )
            raise ArtifactNotFoundError(
                f"Contract {artifact.fully_qualified_name} must be linked with: {libraries}"
            )
