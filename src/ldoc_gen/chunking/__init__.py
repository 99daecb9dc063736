from .chunking import Chunk, assemble_chunks, classify_declaration

__all__ = ["Chunk", "assemble_chunks", "classify_declaration"]
