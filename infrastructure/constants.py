from pathlib import Path

# Packaged reference dataset (versioned with the code)
DATA_DIR = Path(__file__).resolve().parent / "data"
TAXONOMY_FILE = DATA_DIR / "cfi_taxonomy.yaml"
