import sys

from .pipeline import run_pipeline

sys.exit(run_pipeline())
