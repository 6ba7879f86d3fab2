# src/roadgraph/io/config.py
import json
import os

from roadgraph.config.models import GraphConfigModel


def load_config(path: str) -> GraphConfigModel:
    with open(os.path.expandvars(os.path.expanduser(path))) as f:
        return GraphConfigModel.model_validate(json.load(f))
