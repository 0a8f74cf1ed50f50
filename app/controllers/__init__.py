"""Request handlers mounted by the route table in ``app.api.routes``."""
