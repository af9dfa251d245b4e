from blink_invoice.models import CurrencyProfile

WALLET_QUERY = """
  query Me {
    me {
      defaultAccount {
        wallets {
          id
          walletCurrency
        }
      }
    }
  }
"""

_INVOICE_MUTATION = """
  mutation {operation}($input: {input_type}!) {{
    {mutation}(input: $input) {{
      invoice {{
        paymentRequest
        paymentHash
        paymentSecret
        satoshis
        paymentStatus
        createdAt
      }}
      errors {{
        code
        message
        path
      }}
    }}
  }}
"""


def invoice_mutation(profile: CurrencyProfile) -> str:
    return _INVOICE_MUTATION.format(
        operation=profile.operation,
        input_type=profile.input_type,
        mutation=profile.mutation,
    )
