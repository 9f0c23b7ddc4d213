import os

os.environ.setdefault("MF_DISABLE_FILE_LOGS", "1")
