"""Code-valued enumerations used across the collection helpers."""