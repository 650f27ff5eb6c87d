from .encoders import (
    ByteEncoder as ByteEncoder,
    Encoder as Encoder,
    StringEncoder as StringEncoder,
)
