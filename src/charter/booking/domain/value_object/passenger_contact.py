import re
from dataclasses import dataclass

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class PassengerContact:
    """代表者の連絡先

    入力途中の値も保持するため、生成時には検証しない（validation_errors で検証）。
    """

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""

    def validation_errors(self) -> dict[str, str]:
        errors: dict[str, str] = {}
        if not self.first_name.strip():
            errors["first_name"] = "First name is required"
        if not self.last_name.strip():
            errors["last_name"] = "Last name is required"
        if not self.email.strip():
            errors["email"] = "Email is required"
        elif not EMAIL_PATTERN.match(self.email):
            errors["email"] = "Invalid email format"
        if not self.phone.strip():
            errors["phone"] = "Phone number is required"
        return errors
