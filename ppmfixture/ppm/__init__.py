from .encoding import MAGIC, build_header, comment_line, encode_ppm, rgb_bytes

__all__ = ["MAGIC", "build_header", "comment_line", "encode_ppm", "rgb_bytes"]
