from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from marketplace.core.config import settings
from marketplace.core.errors import ServiceError, service_exception_handler, validation_exception_handler
from marketplace.core.logging import log_event, request_id_middleware
from marketplace.db.session import init_db

from marketplace.routers.auth import router as auth_router
from marketplace.routers.items import my_items_router, router as items_router
from marketplace.routers.users import router as users_router


@asynccontextmanager
async def lifespan(app: FastAPI):
	init_db()
	log_event("app_started", app=settings.APP_NAME)
	yield

def create_app(lifespan=lifespan) -> FastAPI:
	app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

	# Middleware
	app.middleware("http")(request_id_middleware)
	app.add_middleware(
		CORSMiddleware,
		allow_origins=settings.ALLOW_ORIGINS,
		allow_credentials=True,
		allow_methods=["*"],
		allow_headers=["*"],
	)

	# Error envelope: {"message": ..., "request_id": ...}
	app.add_exception_handler(ServiceError, service_exception_handler)
	app.add_exception_handler(RequestValidationError, validation_exception_handler)

	# Routers
	app.include_router(auth_router)
	app.include_router(users_router)
	app.include_router(items_router)
	app.include_router(my_items_router)

	@app.get("/first", response_class=PlainTextResponse)
	def first():
		return "You've successfully connected!"

	@app.get("/second", response_class=PlainTextResponse)
	def second():
		return "This is my second get!"

	@app.get("/health")
	def health():
		return {"status": "OK"}

	return app

app = create_app()

if __name__ == "__main__":
	import uvicorn
	uvicorn.run(app, host=settings.HOST, port=settings.PORT)
