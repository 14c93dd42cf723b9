# conftest.py (repo root)
# Repo root en sys.path para imports tipo: kv.*, infra.* sin instalar el paquete.
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
root_str = str(ROOT)

if root_str not in sys.path:
    sys.path.insert(0, root_str)
