"""
Registry pattern utility for creating lookup tables.

This module provides the ``new_registry`` function which creates a registry
dictionary and a decorator for registering handlers. The descriptor layer
uses it twice: once to map tag ids to formatting rules, and once to map
directory namespaces to their rule tables.

Usage example::

    from makernote_tools.registry import new_registry

    RULES, register = new_registry(attribute='tag_id')

    @register(0x0084)
    def describe_lens(directory):
        ...

    rule = RULES[0x0084]
"""

from typing import Any, Callable, Tuple, TypeVar, Union

T = TypeVar("T")


def new_registry(attribute: Union[str, None] = None) -> Tuple[dict, Callable]:
    """
    Returns an empty dict and a @register decorator.

    :param attribute: Optional attribute name to set on registered objects.
                     The key will be stored as this attribute on the object.
    :return: Tuple of (registry_dict, register_decorator)

    Example::

        RULES, register = new_registry(attribute='tag_id')

        @register(NikonType2Tag.ISO_1)
        def describe_iso(directory):
            ...

        # RULES now contains: {NikonType2Tag.ISO_1: describe_iso}
        # describe_iso.tag_id == NikonType2Tag.ISO_1
    """
    registry: dict = {}

    def register(key: Any) -> Callable[[Callable[..., T]], Callable[..., T]]:
        def decorator(func: Callable[..., T]) -> Callable[..., T]:
            registry[key] = func
            if attribute:
                setattr(func, attribute, key)
            return func

        return decorator

    return registry, register
