"""handles — typed registry of data-cy element selectors."""

from handles.registry import HANDLE, Selector, att, iter_handles, resolve

__all__ = ["HANDLE", "Selector", "att", "iter_handles", "resolve"]
