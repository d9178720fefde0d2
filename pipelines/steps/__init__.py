# Namespace for pipeline steps
from .extract_profile import ExtractProfile  # noqa: F401
from .generate_summary import GenerateSummary  # noqa: F401
from .inject_summary import InjectSummary  # noqa: F401
