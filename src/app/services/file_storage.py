"""Export artifact storage port

Artifacts are addressed by a relative key such as
``project-<id>-<timestamp>.json``; the key is what an export stores in
``file_path``.
"""
from abc import ABC, abstractmethod


class FileStorage(ABC):
    @abstractmethod
    async def upload(self, file_path: str, content: bytes) -> str:
        """
        Write an artifact, replacing any previous content under the key

        Returns:
            The key the artifact was stored under
        """
        pass

    @abstractmethod
    async def read(self, file_path: str) -> bytes:
        """
        Read an artifact back

        Raises:
            FileNotFoundError: if nothing is stored under the key
        """
        pass
