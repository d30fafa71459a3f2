import streamlit as st

from equations import EQUATION_REGISTRY
from simulation.integrators import METHOD_REGISTRY


def get_equation_key() -> str:
    st.subheader("Equation")
    return st.selectbox(
        "Differential equation",
        list(EQUATION_REGISTRY.keys()),
        format_func=lambda key: EQUATION_REGISTRY[key].label,
    )


def get_method_keys() -> list:
    st.subheader("Methods")
    return st.multiselect(
        "Methods to run",
        list(METHOD_REGISTRY.keys()),
        default=list(METHOD_REGISTRY.keys()),
        format_func=lambda key: METHOD_REGISTRY[key].name,
    )
