"""Local File Storage Adapter

Keeps export artifacts as files below a single root directory.
"""
import aiofiles
from pathlib import Path
from src.app.services.file_storage import FileStorage


class LocalFileStorage(FileStorage):
    def __init__(self, base_path: str):
        """
        Args:
            base_path: Root directory for artifacts, created when missing
        """
        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _resolve(self, file_path: str) -> Path:
        full_path = (self.base_path / file_path).resolve()
        if self.base_path.resolve() not in full_path.parents:
            raise ValueError(f"Path escapes storage root: {file_path}")
        return full_path

    async def upload(self, file_path: str, content: bytes) -> str:
        full_path = self._resolve(file_path)
        full_path.parent.mkdir(parents=True, exist_ok=True)

        async with aiofiles.open(full_path, "wb") as f:
            await f.write(content)

        return file_path

    async def read(self, file_path: str) -> bytes:
        async with aiofiles.open(self._resolve(file_path), "rb") as f:
            return await f.read()
