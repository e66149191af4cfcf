"""Account registration: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from caterly.domain import caterly
from caterly.identity.account import Account, Role


@caterly.command(part_of="Account")
class RegisterAccount:
    """Create a buyer or caterer account.

    The password arrives already hashed so that plain-text secrets never reach
    the command stream.
    """

    username: String(required=True, max_length=100)
    phone: String(required=True, max_length=30)
    password_hash: String(required=True, max_length=255)
    role: String(required=True, choices=Role)
    business_name: String(max_length=200)
    business_address: String(max_length=500)


@caterly.command_handler(part_of=Account)
class RegisterAccountHandler:
    @handle(RegisterAccount)
    def register_account(self, command):
        repo = current_domain.repository_for(Account)
        if repo._dao.query.filter(phone=command.phone).all().items:
            raise ValidationError({"phone": ["Phone number is already registered"]})

        account = Account.register(
            username=command.username,
            phone=command.phone,
            password_hash=command.password_hash,
            role=command.role,
            business_name=command.business_name,
            business_address=command.business_address,
        )
        repo.add(account)
        return str(account.id)
