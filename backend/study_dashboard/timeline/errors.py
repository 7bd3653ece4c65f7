# study_dashboard/timeline/errors.py
class UnknownStatus(ValueError):
    """Status value outside the fixed Stage set."""

    def __init__(self, value: object):
        super().__init__(f"Unknown study status: {value!r}")
        self.value = value
