# admin/views/__init__.py
from .stall_directory import page_stall_directory
from .add_stall import page_add_stall

_PAGES = {
    "Stall directory": page_stall_directory,
    "Add stall": page_add_stall,
    # capitalised variants
    "Stall Directory": page_stall_directory,
    "Add Stall": page_add_stall,
}

def admin_router(choice: str):
    # Unknown choice falls back to the directory
    return _PAGES.get(choice, page_stall_directory)()
