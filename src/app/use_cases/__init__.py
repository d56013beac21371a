"""Use cases da aplicação."""
