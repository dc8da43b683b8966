from .assembler import RecordAssembler, build_lookup_query, build_search_links

__all__ = ["RecordAssembler", "build_lookup_query", "build_search_links"]
