"""Password hashing with bcrypt."""
import bcrypt

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """Salted one-way password hashing."""
    
    def __init__(self, rounds: int = 12):
        self.rounds = rounds
    
    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")
    
    def verify(self, password: str, hashed: str) -> bool:
        """Check `password` against a stored hash in constant time."""
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            # Malformed stored hash or oversized password
            return False
