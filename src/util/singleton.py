import threading


class Singleton(type):
    _instances: dict[type, object] = {}
    _lock = threading.Lock()

    def __call__(cls, *args, **kwargs):
        with cls._lock:
            if cls not in cls._instances:
                cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]

    def reset(cls):
        """Drops the cached instance so the next call builds a fresh one (e.g. after env changes)."""
        with cls._lock:
            cls._instances.pop(cls, None)
