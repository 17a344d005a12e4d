from fileinclude.processing.classifier import FragmentClassifier
from fileinclude.processing.resolver import IncludeResolver

__all__ = ["FragmentClassifier", "IncludeResolver"]
