"""Field validators; each ``handle`` returns a fragment ready to store."""

from alfred_workflows.params import arg, icon, item_type, mod, text
from alfred_workflows.params.base import coerce_choice

__all__ = ["arg", "coerce_choice", "icon", "item_type", "mod", "text"]
