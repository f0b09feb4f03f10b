"""Interactive skill map: topics, subsections and a click-to-progress path."""
