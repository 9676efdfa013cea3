from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette import status


class ServiceError(Exception):
	status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

	def __init__(self, message: str):
		super().__init__(message)
		self.message = message


class ValidationError(ServiceError):
	status_code = status.HTTP_400_BAD_REQUEST


class AuthRequired(ServiceError):
	status_code = status.HTTP_401_UNAUTHORIZED


class NotFound(ServiceError):
	status_code = status.HTTP_404_NOT_FOUND


class Conflict(ServiceError):
	status_code = status.HTTP_409_CONFLICT


class StoreError(ServiceError):
	pass


def error_response(request: Request, status_code: int, message: str, details=None):
	content = {
		"message": message,
		"request_id": getattr(request.state, "request_id", None),
	}
	if details is not None:
		content["details"] = details
	return JSONResponse(status_code=status_code, content=content)

async def service_exception_handler(request: Request, exc: ServiceError):
	return error_response(request, exc.status_code, exc.message)

async def validation_exception_handler(request: Request, exc: RequestValidationError):
	# Body problems are client errors like any other malformed input.
	details = [
		{"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
		for err in exc.errors()
	]
	message = "Validation error"
	if details:
		field = ".".join(str(part) for part in details[0]["loc"] if part != "body")
		message = f"{field}: {details[0]['msg']}" if field else details[0]["msg"]
	return error_response(request, status.HTTP_400_BAD_REQUEST, message, details=details)
