"""CDK stacks for web UI deployments."""

from .web_ui_stack import SimpleWebUIStack

__all__ = ["SimpleWebUIStack"]
