class PathNavError(Exception):
    pass


class UnresolvedStepError(PathNavError, TypeError):
    def __init__(self, step):
        super().__init__(
            f"Cannot navigate with {step!r} ({type(step).__name__}); "
            "use a navigator, a key, an index or a predicate")
        self.step = step


class MultipleFocusError(PathNavError, ValueError):
    def __init__(self, path, count):
        super().__init__(f"{path!r} selected {count} values, expected at most one")
        self.path = path
        self.count = count
