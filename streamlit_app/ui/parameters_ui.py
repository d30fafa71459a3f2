import streamlit as st

from config import DEFAULT_PARAMETERS


def get_parameters() -> dict:
    """
    Streamlit inputs for the initial point, target and step size.

    Returns:
        dict: Keys x0, y0, x_target, step_size, ready for
            `NumericalMethod.set_parameters(**params)`.
    """
    st.subheader("Initial Conditions")

    x0 = st.number_input("Initial x (x0)", value=DEFAULT_PARAMETERS["x0"], format="%.4f")
    y0 = st.number_input("Initial y (y0)", value=DEFAULT_PARAMETERS["y0"], format="%.4f")
    x_target = st.number_input("Target x", value=DEFAULT_PARAMETERS["x_target"], format="%.4f")
    step_size = st.number_input(
        "Step size (h)", value=DEFAULT_PARAMETERS["step_size"], step=0.01, format="%.4f"
    )

    return dict(x0=x0, y0=y0, x_target=x_target, step_size=step_size)
