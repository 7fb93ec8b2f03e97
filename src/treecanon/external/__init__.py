from .nauty import (
    NAUTY_SHORTG,
    NAUTY_GENTREEG,
    nauty_available,
    gentreeg_available,
    shortg_form,
    shortg_classes,
    agrees_with_shortg,
    gentreeg_s6,
    gentreeg_trees,
)

__all__ = [
    "NAUTY_SHORTG",
    "NAUTY_GENTREEG",
    "nauty_available",
    "gentreeg_available",
    "shortg_form",
    "shortg_classes",
    "agrees_with_shortg",
    "gentreeg_s6",
    "gentreeg_trees",
]
