from .logger_stream import LoggerStream as LoggerStream
from .protocol import LoggerProtocol as LoggerProtocol
