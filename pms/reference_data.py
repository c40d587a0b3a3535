"""Static reference data for the demo dataset.

Prices are a fixed market snapshot; they only need to be plausible.
"""

SECURITIES = [
    # Stocks
    {"symbol": "AAPL", "security_name": "Apple Inc.", "security_type": "STOCK", "sector": "Technology",
     "current_price": "178.50", "previous_close": "176.20", "fifty_two_week_high": "199.62",
     "fifty_two_week_low": "164.08", "dividend_yield": "0.52", "pe_ratio": "29.10", "market_cap": "2780000000000"},
    {"symbol": "MSFT", "security_name": "Microsoft Corporation", "security_type": "STOCK", "sector": "Technology",
     "current_price": "378.85", "previous_close": "381.10", "fifty_two_week_high": "384.30",
     "fifty_two_week_low": "275.37", "dividend_yield": "0.79", "pe_ratio": "36.40", "market_cap": "2810000000000"},
    {"symbol": "GOOGL", "security_name": "Alphabet Inc. Class A", "security_type": "STOCK",
     "sector": "Communication Services", "current_price": "138.21", "previous_close": "136.94",
     "fifty_two_week_high": "142.68", "fifty_two_week_low": "98.05", "pe_ratio": "26.30",
     "market_cap": "1740000000000"},
    {"symbol": "AMZN", "security_name": "Amazon.com Inc.", "security_type": "STOCK",
     "sector": "Consumer Discretionary", "current_price": "146.09", "previous_close": "147.73",
     "fifty_two_week_high": "149.26", "fifty_two_week_low": "88.12", "pe_ratio": "76.20",
     "market_cap": "1510000000000"},
    {"symbol": "NVDA", "security_name": "NVIDIA Corporation", "security_type": "STOCK", "sector": "Technology",
     "current_price": "467.65", "previous_close": "455.10", "fifty_two_week_high": "505.48",
     "fifty_two_week_low": "138.84", "dividend_yield": "0.03", "pe_ratio": "61.80", "market_cap": "1150000000000"},
    {"symbol": "JPM", "security_name": "JPMorgan Chase & Co.", "security_type": "STOCK", "sector": "Financials",
     "current_price": "156.72", "previous_close": "155.30", "fifty_two_week_high": "159.38",
     "fifty_two_week_low": "123.11", "dividend_yield": "2.68", "pe_ratio": "9.60", "market_cap": "453000000000"},
    {"symbol": "JNJ", "security_name": "Johnson & Johnson", "security_type": "STOCK", "sector": "Healthcare",
     "current_price": "155.40", "previous_close": "156.01", "fifty_two_week_high": "181.04",
     "fifty_two_week_low": "144.95", "dividend_yield": "3.06", "pe_ratio": "15.20", "market_cap": "374000000000"},
    {"symbol": "PG", "security_name": "Procter & Gamble Co.", "security_type": "STOCK",
     "sector": "Consumer Staples", "current_price": "150.33", "previous_close": "149.80",
     "fifty_two_week_high": "158.38", "fifty_two_week_low": "141.45", "dividend_yield": "2.50",
     "pe_ratio": "24.70", "market_cap": "354000000000"},
    {"symbol": "XOM", "security_name": "Exxon Mobil Corporation", "security_type": "STOCK", "sector": "Energy",
     "current_price": "103.25", "previous_close": "104.66", "fifty_two_week_high": "120.70",
     "fifty_two_week_low": "97.88", "dividend_yield": "3.68", "pe_ratio": "11.40", "market_cap": "410000000000"},
    {"symbol": "KO", "security_name": "The Coca-Cola Company", "security_type": "STOCK",
     "sector": "Consumer Staples", "current_price": "58.46", "previous_close": "58.12",
     "fifty_two_week_high": "64.99", "fifty_two_week_low": "51.55", "dividend_yield": "3.15",
     "pe_ratio": "23.50", "market_cap": "253000000000"},
    {"symbol": "VZ", "security_name": "Verizon Communications Inc.", "security_type": "STOCK",
     "sector": "Communication Services", "current_price": "37.91", "previous_close": "37.62",
     "fifty_two_week_high": "42.83", "fifty_two_week_low": "30.14", "dividend_yield": "7.02",
     "pe_ratio": "7.80", "market_cap": "159000000000"},
    {"symbol": "TSLA", "security_name": "Tesla Inc.", "security_type": "STOCK", "sector": "Consumer Discretionary",
     "current_price": "238.83", "previous_close": "242.68", "fifty_two_week_high": "299.29",
     "fifty_two_week_low": "101.81", "pe_ratio": "72.90", "market_cap": "760000000000"},
    # Bonds
    {"symbol": "UST10Y", "security_name": "US Treasury 10 Year Note", "security_type": "BOND",
     "sector": "Government", "current_price": "96.42", "previous_close": "96.55", "dividend_yield": "4.25",
     "bond_rating": "AAA", "maturity_date": "2033-11-15", "coupon_rate": "4.50"},
    {"symbol": "UST30Y", "security_name": "US Treasury 30 Year Bond", "security_type": "BOND",
     "sector": "Government", "current_price": "92.18", "previous_close": "92.40", "dividend_yield": "4.40",
     "bond_rating": "AAA", "maturity_date": "2053-11-15", "coupon_rate": "4.75"},
    {"symbol": "MUNI-CA", "security_name": "California General Obligation Bond", "security_type": "BOND",
     "sector": "Municipal", "current_price": "101.35", "previous_close": "101.20", "dividend_yield": "3.10",
     "bond_rating": "AA", "maturity_date": "2035-08-01", "coupon_rate": "3.25"},
    {"symbol": "CORP-AAPL", "security_name": "Apple Inc. 3.85% Notes", "security_type": "BOND",
     "sector": "Corporate", "current_price": "94.77", "previous_close": "94.90", "dividend_yield": "3.85",
     "bond_rating": "AA+", "maturity_date": "2043-05-04", "coupon_rate": "3.85"},
    {"symbol": "CORP-JPM", "security_name": "JPMorgan Chase 4.25% Notes", "security_type": "BOND",
     "sector": "Corporate", "current_price": "97.60", "previous_close": "97.45", "dividend_yield": "4.25",
     "bond_rating": "A-", "maturity_date": "2030-10-01", "coupon_rate": "4.25"},
    # Mutual funds
    {"symbol": "VFIAX", "security_name": "Vanguard 500 Index Fund Admiral", "security_type": "MUTUAL_FUND",
     "current_price": "418.26", "previous_close": "415.90", "dividend_yield": "1.42", "expense_ratio": "0.04"},
    {"symbol": "FXAIX", "security_name": "Fidelity 500 Index Fund", "security_type": "MUTUAL_FUND",
     "current_price": "163.14", "previous_close": "162.22", "dividend_yield": "1.38", "expense_ratio": "0.02"},
    {"symbol": "VWELX", "security_name": "Vanguard Wellington Fund", "security_type": "MUTUAL_FUND",
     "current_price": "40.67", "previous_close": "40.51", "dividend_yield": "2.35", "expense_ratio": "0.25"},
    {"symbol": "PTTRX", "security_name": "PIMCO Total Return Fund", "security_type": "MUTUAL_FUND",
     "current_price": "8.52", "previous_close": "8.54", "dividend_yield": "4.60", "expense_ratio": "0.46"},
    # ETFs
    {"symbol": "SPY", "security_name": "SPDR S&P 500 ETF Trust", "security_type": "ETF",
     "current_price": "455.02", "previous_close": "452.48", "fifty_two_week_high": "459.44",
     "fifty_two_week_low": "374.77", "dividend_yield": "1.45", "expense_ratio": "0.09"},
    {"symbol": "QQQ", "security_name": "Invesco QQQ Trust", "security_type": "ETF",
     "current_price": "390.08", "previous_close": "386.54", "fifty_two_week_high": "392.82",
     "fifty_two_week_low": "254.26", "dividend_yield": "0.58", "expense_ratio": "0.20"},
    {"symbol": "VTI", "security_name": "Vanguard Total Stock Market ETF", "security_type": "ETF",
     "current_price": "225.11", "previous_close": "223.97", "fifty_two_week_high": "227.17",
     "fifty_two_week_low": "187.32", "dividend_yield": "1.48", "expense_ratio": "0.03"},
    {"symbol": "BND", "security_name": "Vanguard Total Bond Market ETF", "security_type": "ETF",
     "current_price": "71.34", "previous_close": "71.41", "fifty_two_week_high": "74.04",
     "fifty_two_week_low": "67.99", "dividend_yield": "3.21", "expense_ratio": "0.03"},
]

FIRST_NAMES = [
    "James", "Mary", "Robert", "Patricia", "John", "Jennifer", "Michael", "Linda", "David", "Elizabeth",
    "William", "Barbara", "Richard", "Susan", "Joseph", "Jessica", "Thomas", "Sarah", "Charles", "Karen",
    "Daniel", "Nancy", "Matthew", "Lisa", "Anthony", "Priya", "Wei", "Fatima", "Carlos", "Aiko",
]

LAST_NAMES = [
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis", "Rodriguez", "Martinez",
    "Hernandez", "Lopez", "Wilson", "Anderson", "Thomas", "Taylor", "Moore", "Jackson", "Martin", "Lee",
    "Thompson", "White", "Harris", "Clark", "Lewis", "Patel", "Chen", "Nguyen", "Okafor", "Tanaka",
]

CITIES = [
    ("New York", "NY", "10001"),
    ("Chicago", "IL", "60601"),
    ("Austin", "TX", "78701"),
    ("Seattle", "WA", "98101"),
    ("Denver", "CO", "80202"),
    ("Boston", "MA", "02108"),
    ("Atlanta", "GA", "30303"),
    ("San Diego", "CA", "92101"),
]

STREETS = ["Main St", "Oak Ave", "Maple Dr", "Cedar Ln", "Park Blvd", "Elm St", "Lakeview Rd", "Hillcrest Way"]

PORTFOLIO_NAMES = {
    "BROKERAGE": ["Growth Portfolio", "Balanced Portfolio"],
    "IRA": ["Retirement Growth", "Income Portfolio"],
    "ROTH_IRA": ["Tax-Free Growth", "Long-Term Growth"],
    "401K": ["Target Retirement 2050", "Aggressive Growth"],
}

MODEL_PORTFOLIOS = {
    "AGGRESSIVE": "GROWTH_80_20",
    "MODERATE": "GROWTH_60_40",
    "CONSERVATIVE": "CONSERVATIVE_40_60",
}

DEFAULT_ADVISOR_ID = "ADV-001"
