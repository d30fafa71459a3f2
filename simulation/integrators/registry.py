from .euler import EulersMethod
from .modified_euler import ModifiedEulersMethod
from .runge_kutta2 import RungeKutta2
from .runge_kutta4 import RungeKutta4
from .adams_bashforth import AdamsBashforth

METHOD_REGISTRY = {
    "euler": EulersMethod,
    "modified_euler": ModifiedEulersMethod,
    "rk2": RungeKutta2,
    "rk4": RungeKutta4,
    "adams_bashforth": AdamsBashforth,
}

# menu numbering of the console front-end, 6 runs every method
MENU_CHOICES = {
    1: "euler",
    2: "modified_euler",
    3: "rk2",
    4: "rk4",
    5: "adams_bashforth",
}
ALL_METHODS_CHOICE = 6


def create_method(key: str, *args, **kwargs):
    """Instantiate a registered method by key, forwarding constructor arguments."""
    try:
        method_cls = METHOD_REGISTRY[key]
    except KeyError:
        valid = ", ".join(METHOD_REGISTRY)
        raise KeyError(f"Unknown method '{key}' (expected one of: {valid})") from None
    return method_cls(*args, **kwargs)


def create_all_methods(*args, **kwargs):
    return [method_cls(*args, **kwargs) for method_cls in METHOD_REGISTRY.values()]
