"""Service layer: configuration, SEO substitution, minification."""
