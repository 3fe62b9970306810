"""An AWS Python Pulumi program"""

from converter_infra.config import load_config
from converter_infra.stack import create_stack, export_outputs


# Fails here when appRepoUrl is not set, before anything is declared
cfg = load_config()

stack = create_stack(cfg)

export_outputs(stack)
