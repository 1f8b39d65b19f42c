"""Input/target sequence generators for driving the network."""

from .sine_cosine import SineCosineTask, make_sine_cosine_task

__all__ = [
    "SineCosineTask",
    "make_sine_cosine_task",
]
