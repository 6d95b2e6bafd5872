"""Layer catalogue — the eight generated-unit kinds and their fixed traits.

The first five kinds are method-bearing: each holds an interface plus an
implementing struct and gains methods as use-cases are attached. The last
three are data-only model units that gain one or two plain structs per
use-case.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from cleanctl.domain.names import dir_label


class LayerKind(StrEnum):
    """Generated-unit roles, valued by their package name."""

    BOUNDARY_IN = "controller"
    BOUNDARY_OUT = "presenter"
    RENDERER = "view"
    BUSINESS_LOGIC = "interactor"
    VALIDATOR = "validator"
    REQUEST_MODEL = "reqmodel"
    RESPONSE_MODEL = "respmodel"
    VIEW_MODEL = "viewmodel"


@dataclass(frozen=True)
class LayerSpec:
    """Fixed traits of one LayerKind."""

    rel_path: str
    method_bearing: bool
    label: str = ""
    token_prefix: str = ""
    imports: tuple[LayerKind, ...] = ()
    has_err_val: bool = False

    @property
    def package(self) -> str:
        return dir_label(self.rel_path)


LAYERS: dict[LayerKind, LayerSpec] = {
    LayerKind.BOUNDARY_IN: LayerSpec(
        rel_path="ifadapter/controller/",
        method_bearing=True,
        label="Controller",
        imports=(LayerKind.BUSINESS_LOGIC, LayerKind.REQUEST_MODEL),
    ),
    LayerKind.BOUNDARY_OUT: LayerSpec(
        rel_path="ifadapter/presenter/",
        method_bearing=True,
        label="Presenter",
        token_prefix="Present",
        imports=(LayerKind.RENDERER, LayerKind.VIEW_MODEL, LayerKind.RESPONSE_MODEL),
    ),
    LayerKind.RENDERER: LayerSpec(
        rel_path="ifadapter/view/",
        method_bearing=True,
        label="View",
        token_prefix="Render",
        imports=(LayerKind.VIEW_MODEL,),
    ),
    LayerKind.BUSINESS_LOGIC: LayerSpec(
        rel_path="usecase/interactor/",
        method_bearing=True,
        label="Interactor",
        imports=(
            LayerKind.BOUNDARY_OUT,
            LayerKind.REQUEST_MODEL,
            LayerKind.VALIDATOR,
            LayerKind.RESPONSE_MODEL,
        ),
    ),
    LayerKind.VALIDATOR: LayerSpec(
        rel_path="usecase/reqmodel/validator/",
        method_bearing=True,
        label="Validator",
        token_prefix="Validate",
        imports=(LayerKind.REQUEST_MODEL, LayerKind.RESPONSE_MODEL),
    ),
    LayerKind.REQUEST_MODEL: LayerSpec(
        rel_path="usecase/reqmodel/",
        method_bearing=False,
    ),
    LayerKind.RESPONSE_MODEL: LayerSpec(
        rel_path="usecase/respmodel/",
        method_bearing=False,
        has_err_val=True,
    ),
    LayerKind.VIEW_MODEL: LayerSpec(
        rel_path="ifadapter/view/viewmodel/",
        method_bearing=False,
        has_err_val=True,
    ),
}

METHOD_BEARING_KINDS: tuple[LayerKind, ...] = tuple(
    kind for kind in LayerKind if LAYERS[kind].method_bearing
)
MODEL_KINDS: tuple[LayerKind, ...] = tuple(
    kind for kind in LayerKind if not LAYERS[kind].method_bearing
)


def layer_spec(kind: LayerKind | str) -> LayerSpec:
    """Look up the LayerSpec for *kind* (enum member or package name)."""
    try:
        return LAYERS[LayerKind(kind)]
    except ValueError:
        msg = f"Unknown layer kind: {kind!r}"
        raise ValueError(msg) from None
