"""Object helpers -- public re-exports."""

from csschain.objects.rectangle import Rectangle
from csschain.objects.serialization import deserialize, serialize

__all__ = ["Rectangle", "serialize", "deserialize"]
