import bcrypt

def _normalize_password(password: str) -> bytes:
	# bcrypt only considers the first 72 bytes; truncate consistently to avoid errors.
	return password.encode("utf-8")[:72]

def hash_password(password: str) -> str:
	hashed = bcrypt.hashpw(_normalize_password(password), bcrypt.gensalt())
	return hashed.decode("utf-8")

def verify_password(password: str, password_hash: str) -> bool:
	try:
		return bcrypt.checkpw(_normalize_password(password), password_hash.encode("utf-8"))
	except ValueError:
		return False
