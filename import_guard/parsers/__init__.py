"""Line classifiers, auto-registered via the @register_classifier decorator."""

from .base import LineClassifier, get_classifier_for_file, get_registry, register_classifier
from .groovy import GroovyLineClassifier  # noqa: F401
from .java import JavaLineClassifier  # noqa: F401
from .kotlin import KotlinLineClassifier  # noqa: F401
from .scanner import LineScanner

__all__ = [
    "LineClassifier",
    "LineScanner",
    "get_classifier_for_file",
    "get_registry",
    "register_classifier",
]
