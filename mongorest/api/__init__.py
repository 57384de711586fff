from .resources import router as resources_router

routers = [resources_router]
