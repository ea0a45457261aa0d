"""Permitted code sets used by field validation.

All sets are frozensets built once at import; nothing here is mutated at runtime.
"""

from __future__ import annotations

# ISO 4217 currency codes (active codes plus funds/precious-metal codes Fedwire accepts).
CURRENCY_CODES: frozenset[str] = frozenset(
    """
    AED AFN ALL AMD ANG AOA ARS AUD AWG AZN BAM BBD BDT BGN BHD BIF BMD BND BOB BOV
    BRL BSD BTN BWP BYN BZD CAD CDF CHE CHF CHW CLF CLP CNY COP COU CRC CUC CUP CVE
    CZK DJF DKK DOP DZD EGP ERN ETB EUR FJD FKP GBP GEL GHS GIP GMD GNF GTQ GYD HKD
    HNL HRK HTG HUF IDR ILS INR IQD IRR ISK JMD JOD JPY KES KGS KHR KMF KPW KRW KWD
    KYD KZT LAK LBP LKR LRD LSL LYD MAD MDL MGA MKD MMK MNT MOP MRU MUR MVR MWK MXN
    MXV MYR MZN NAD NGN NIO NOK NPR NZD OMR PAB PEN PGK PHP PKR PLN PYG QAR RON RSD
    RUB RWF SAR SBD SCR SDG SEK SGD SHP SLE SLL SOS SRD SSP STN SVC SYP SZL THB TJS
    TMT TND TOP TRY TTD TWD TZS UAH UGX USD USN UYI UYU UYW UZS VED VES VND VUV WST
    XAF XAG XAU XBA XBB XBC XBD XCD XDR XOF XPD XPF XPT XSU XTS XUA XXX YER ZAR ZMW
    ZWL
    """.split()
)

# {1500}
FORMAT_VERSIONS: frozenset[str] = frozenset({"30"})
TEST_PRODUCTION_CODES: frozenset[str] = frozenset({"T", "P"})
MESSAGE_DUPLICATION_CODES: frozenset[str] = frozenset({"P"})

# {1510}
TYPE_CODES: frozenset[str] = frozenset(
    {
        "10",  # funds transfer
        "15",  # foreign transfer
        "16",  # settlement transfer
    }
)
SUBTYPE_CODES: frozenset[str] = frozenset(
    {
        "00",  # basic funds transfer
        "01",  # request for reversal
        "02",  # reversal of transfer
        "07",  # request for reversal of a prior day transfer
        "08",  # reversal of a prior day transfer
        "31",  # request for credit (drawdown)
        "32",  # funds transfer honoring a request for credit
        "33",  # refusal to honor a request for credit
        "90",  # service message
    }
)

# {3600}
BUSINESS_FUNCTION_CODES: frozenset[str] = frozenset(
    {"BTR", "CKS", "CTP", "CTR", "DEP", "DRB", "DRC", "DRW", "FFR", "FFS", "SVC"}
)

# Financial institution identification codes ({5100}-{5400} style records).
FI_IDENTIFICATION_CODES: frozenset[str] = frozenset(
    {
        "B",  # SWIFT BIC
        "C",  # CHIPS participant
        "D",  # demand deposit account number
        "F",  # Fed routing number
        "T",  # SWIFT BEI
        "U",  # CHIPS identifier
    }
)

# {8250}
REMITTANCE_LOCATION_METHODS: frozenset[str] = frozenset(
    {"EDIC", "EMAL", "FAXI", "POST", "SMSM", "URID"}
)
ADDRESS_TYPES: frozenset[str] = frozenset({"ADDR", "BIZZ", "DLVY", "HOME", "MLTO", "PBOX"})

# {8600}
ADJUSTMENT_REASON_CODES: frozenset[str] = frozenset(
    {
        "01",  # pricing error
        "03",  # extension error
        "04",  # item not accepted (damaged)
        "05",  # item not accepted (quality)
        "06",  # quantity contested
        "07",  # incorrect product
        "11",  # returns (damaged)
        "12",  # returns (quality)
        "59",  # item not received
        "75",  # total order not received
        "81",  # credit as agreed
        "CM",  # covered by credit memo
    }
)
CREDIT_DEBIT_INDICATORS: frozenset[str] = frozenset({"CRDT", "DBIT"})

PRICING_ERROR = "01"
CREDIT_INDICATOR = "CRDT"
DEBIT_INDICATOR = "DBIT"
DEMAND_DEPOSIT_ACCOUNT_NUMBER = "D"
