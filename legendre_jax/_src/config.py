import numpy as np

__default_conf = {
    "dtype": "float64",  # dtype of the tables allocated by `legendre` and `dlegendre`
    "derivative_angle_check": "ignore",  # "ignore" or "warn"
}

__allowed_values = {
    "derivative_angle_check": ("ignore", "warn"),
}

__conf = __default_conf.copy()


def config(name, value=None):
    if name not in __conf:
        raise ValueError("Unknown configuration option: {}".format(name))

    if value is None:
        return __conf[name]

    if name in __allowed_values and value not in __allowed_values[name]:
        raise ValueError(
            f"Invalid value {value!r} for {name}, expected one of {__allowed_values[name]}"
        )

    if name == "dtype":
        try:
            np.dtype(value)
        except TypeError as e:
            raise ValueError(f"Invalid dtype {value!r}") from e

    __conf[name] = value
