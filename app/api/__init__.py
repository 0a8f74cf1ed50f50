"""HTTP layer: route table, request/response models and error handlers."""
