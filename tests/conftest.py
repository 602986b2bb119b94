"""Configuração do pytest para o extrator de leads."""

import sys
from pathlib import Path

# Adiciona src/ e scripts/ ao PYTHONPATH para permitir imports absolutos
_root = Path(__file__).parent.parent
for _path in (_root / "src", _root / "scripts"):
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))
