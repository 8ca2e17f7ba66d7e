class Environment:
    """Variable bindings shared by successive evaluations.

    Names keep insertion order so listings read in the order they were bound.
    """

    def __init__(self, bindings=None):
        self._bindings = {}
        if bindings:
            for name, value in dict(bindings).items():
                self.set(name, value)

    def get(self, name):
        return self._bindings.get(name)

    def set(self, name, value):
        self._bindings[name] = float(value)

    def remove(self, name):
        self._bindings.pop(name, None)

    def clear(self):
        self._bindings.clear()

    def __getitem__(self, name):
        return self._bindings[name]

    def __contains__(self, name):
        return name in self._bindings

    def __len__(self):
        return len(self._bindings)

    def __iter__(self):
        return iter(list(self._bindings.items()))

    def __repr__(self):
        return f"Environment({self._bindings})"
