# NOTE: contract modules can't call into python, they fail with the literal
# strings. Keep these in sync with the messages in contracts/.

def make_error_msg(prefix: str, message: str):
    return (prefix + message)

# Access control
def only_admin(prefix=""):           return make_error_msg(prefix, "ONLY_ADMIN")
def only_self(prefix=""):            return make_error_msg(prefix, "ONLY_SELF")
def not_burner(prefix=""):           return make_error_msg(prefix, "NOT_BURNER")

# Mint pass related
def pass_not_found(prefix=""):       return make_error_msg(prefix, "PASS_NOT_FOUND")
def pass_exists(prefix=""):          return make_error_msg(prefix, "PASS_EXISTS")
def minting_closed(prefix=""):       return make_error_msg(prefix, "MINTING_CLOSED")
def insufficient_balance(prefix=""): return make_error_msg(prefix, "INSUFFICIENT_BALANCE")
def wrong_amount(prefix=""):         return make_error_msg(prefix, "WRONG_AMOUNT")
def parameter_error(prefix=""):      return make_error_msg(prefix, "PARAM_ERROR")
def reentrant(prefix=""):            return make_error_msg(prefix, "REENTRANT")

# FA2
def fa2_not_operator(prefix=""):         return make_error_msg(prefix, "FA2_NOT_OPERATOR")
def fa2_not_owner(prefix=""):            return make_error_msg(prefix, "FA2_NOT_OWNER")
def fa2_insufficient_balance(prefix=""): return make_error_msg(prefix, "FA2_INSUFFICIENT_BALANCE")
