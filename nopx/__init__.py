"""Find px length literals in stylesheets and convert them to rem."""
