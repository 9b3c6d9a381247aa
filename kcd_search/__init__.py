"""KCD disease search: upstream lookup, ranking and a thin HTTP surface."""
