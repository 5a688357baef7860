class InvalidArgumentError(TypeError):
    def __init__(self, name: str, val: object | None, expected: type | str) -> None:
        super().__init__()
        self._name = name
        self._val = val
        self._expected = expected

    def __str__(self) -> str:
        expected = (
            self._expected
            if isinstance(self._expected, str)
            else self._expected.__name__
        )
        got = type(self._val).__name__
        return f"{self._name} is required: expected {expected}, got {got}"

    def __repr__(self) -> str:
        return f"InvalidArgumentError({self._name!r}, {self._val!r}, {self._expected!r})"
