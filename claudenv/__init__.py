"""claudenv: detect a project's stack and scaffold its assistant docs."""

__version__ = "0.3.0"
