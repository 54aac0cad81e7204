from rscss.selector.segmenter import extract_class_tokens, segment

__all__ = ["segment", "extract_class_tokens"]
