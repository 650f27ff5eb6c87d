from .version import InvalidVersionFormat as InvalidVersionFormat
