"""md2mdc - convert markdown trees into Cursor rule (.mdc) trees."""
