# somlattice/config/defaults.py
"""Default configuration values"""

from pathlib import Path

# Project path
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / 'logs'

# Path configuration
PATHS = {
    'project_root': str(PROJECT_ROOT),
    'logs_dir': str(LOGS_DIR),
    'test_data_dir': str(PROJECT_ROOT / 'tests' / 'data'),
}

# SOM lattice and preprocessing defaults
SOM = {
    'xdim': 10,
    'ydim': 10,
    'toroidal': False,
    'topology': 'rectangular',
    'normalization': 'zscore',  # minmax, zscore, none
}

LOGGING = {
    'level': 'INFO',
    'file': str(LOGS_DIR / 'somlattice.log'),
    'max_file_size': 10 * 1024 * 1024,  # 10MB
    'backup_count': 5,
}
