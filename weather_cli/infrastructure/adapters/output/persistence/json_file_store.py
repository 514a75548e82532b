"""
JSON File Store - leitura/escrita atômica de documentos JSON locais
Base dos repositórios de favoritos, histórico e cidades por país
"""
import json
import os
import tempfile
from pathlib import Path
from typing import Any, Union


class JsonFileStore:
    """Arquivo JSON único; escrita via arquivo temporário + rename"""

    def __init__(self, path: Union[str, Path], default: Any = None):
        self.path = Path(path).expanduser()
        self.default = default

    def exists(self) -> bool:
        return self.path.exists()

    def read(self) -> Any:
        if not self.path.exists():
            return self._default()
        with open(self.path, 'r', encoding='utf-8') as f:
            content = f.read().strip()
        if not content:
            return self._default()
        return json.loads(content)

    def write(self, data: Any) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=f".{self.path.name}.")
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def _default(self) -> Any:
        if isinstance(self.default, (list, dict)):
            return type(self.default)(self.default)
        return self.default
