from models.clipitem import ClipItem, clean_text, new_item_id

__all__ = [
    'ClipItem',
    'clean_text',
    'new_item_id',
]
