from vmath.codec.json_codec import encode, decode
