import os
from dotenv import load_dotenv

# Load .env (if present) so env-based configuration works in dev
load_dotenv()

# Label used in error messages, e.g. "looking for a string in job.Arg[name] ..."
ARGS_LABEL = os.getenv("MAP_PARAMS_ARGS_LABEL", "job.Arg")

# Behavior
LOG_ERRORS = os.getenv("MAP_PARAMS_LOG_ERRORS", "0") in ("1", "true", "True")
