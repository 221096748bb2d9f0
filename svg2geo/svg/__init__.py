"""SVG document reading: parser, basic shapes, stroke outlines."""
