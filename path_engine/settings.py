# path_engine/settings.py
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Always run Bellman-Ford, even on graphs without negative edges
FORCE_BELLMAN_FORD = os.getenv('PATH_ENGINE_FORCE_BELLMAN_FORD', 'False') == 'True'

# Run an extra Bellman-Ford pass and raise NegativeCycleError on a reachable negative cycle
DETECT_NEGATIVE_CYCLES = os.getenv('PATH_ENGINE_DETECT_NEGATIVE_CYCLES', 'False') == 'True'
