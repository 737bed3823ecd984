SAMPLE_FILE_NAME = "dados_exemplo_gerados.xlsx"

# Demo catalog used to seed an empty store.
SAMPLE_ITEMS = [
    dict(model="iPhone 15 Pro Max", brand="Apple", type="Silicone", color="Preto", unit_price=34.90, quantity=45, supplier="ImportCases", entry_date="2025-01-10"),
    dict(model="iPhone 15 Pro Max", brand="Apple", type="Transparente", color="Transparente", unit_price=19.90, quantity=0, supplier="ImportCases", entry_date="2025-01-10"),
    dict(model="iPhone 15 Pro", brand="Apple", type="Silicone", color="Azul Marinho", unit_price=32.90, quantity=28, supplier="ImportCases", entry_date="2025-01-12"),
    dict(model="iPhone 15 Pro", brand="Apple", type="Carteira", color="Marrom", unit_price=49.90, quantity=3, supplier="CaseWholesale", entry_date="2025-01-15"),
    dict(model="iPhone 15", brand="Apple", type="Rígida", color="Vermelho", unit_price=24.90, quantity=0, supplier="ImportCases", entry_date="2025-01-08"),
    dict(model="iPhone 15", brand="Apple", type="Silicone", color="Rosa", unit_price=29.90, quantity=15, supplier="ImportCases", entry_date="2025-01-08"),
    dict(model="iPhone 14", brand="Apple", type="Silicone", color="Preto", unit_price=24.90, quantity=2, supplier="CaseWholesale", entry_date="2024-12-20"),
    dict(model="iPhone 14", brand="Apple", type="Transparente", color="Transparente", unit_price=14.90, quantity=50, supplier="CaseWholesale", entry_date="2024-12-20"),
    dict(model="iPhone 13", brand="Apple", type="Silicone", color="Verde", unit_price=19.90, quantity=0, supplier="ImportCases", entry_date="2024-11-10"),
    dict(model="iPhone 13", brand="Apple", type="Anti-impacto", color="Preto", unit_price=39.90, quantity=4, supplier="ProtectMax", entry_date="2024-11-10"),
    dict(model="Galaxy S24 Ultra", brand="Samsung", type="Silicone", color="Preto", unit_price=34.90, quantity=35, supplier="ImportCases", entry_date="2025-01-15"),
    dict(model="Galaxy S24 Ultra", brand="Samsung", type="Anti-impacto", color="Azul", unit_price=44.90, quantity=0, supplier="ProtectMax", entry_date="2025-01-15"),
    dict(model="Galaxy S24", brand="Samsung", type="Transparente", color="Transparente", unit_price=17.90, quantity=22, supplier="ImportCases", entry_date="2025-01-14"),
    dict(model="Galaxy S24", brand="Samsung", type="Carteira", color="Preto", unit_price=44.90, quantity=1, supplier="CaseWholesale", entry_date="2025-01-14"),
    dict(model="Galaxy S23", brand="Samsung", type="Silicone", color="Roxo", unit_price=24.90, quantity=18, supplier="ImportCases", entry_date="2024-12-01"),
    dict(model="Galaxy S23", brand="Samsung", type="Rígida", color="Branco", unit_price=22.90, quantity=0, supplier="CaseWholesale", entry_date="2024-12-01"),
    dict(model="Galaxy A54", brand="Samsung", type="Silicone", color="Preto", unit_price=19.90, quantity=40, supplier="ImportCases", entry_date="2024-12-05"),
    dict(model="Galaxy A54", brand="Samsung", type="Transparente", color="Transparente", unit_price=12.90, quantity=5, supplier="ImportCases", entry_date="2024-12-05"),
    dict(model="Galaxy A34", brand="Samsung", type="Silicone", color="Azul", unit_price=17.90, quantity=0, supplier="CaseWholesale", entry_date="2024-11-20"),
    dict(model="Moto G84", brand="Motorola", type="Silicone", color="Preto", unit_price=19.90, quantity=25, supplier="CaseWholesale", entry_date="2025-01-05"),
    dict(model="Moto G84", brand="Motorola", type="Transparente", color="Transparente", unit_price=12.90, quantity=3, supplier="CaseWholesale", entry_date="2025-01-05"),
    dict(model="Moto G73", brand="Motorola", type="Anti-impacto", color="Preto", unit_price=29.90, quantity=0, supplier="ProtectMax", entry_date="2024-12-10"),
    dict(model="Moto G53", brand="Motorola", type="Silicone", color="Azul", unit_price=14.90, quantity=12, supplier="ImportCases", entry_date="2024-11-25"),
    dict(model="Moto Edge 40", brand="Motorola", type="Rígida", color="Verde", unit_price=27.90, quantity=2, supplier="CaseWholesale", entry_date="2024-12-15"),
    dict(model="Moto Edge 40", brand="Motorola", type="Carteira", color="Marrom", unit_price=39.90, quantity=0, supplier="CaseWholesale", entry_date="2024-12-15"),
    dict(model="Redmi Note 13 Pro", brand="Xiaomi", type="Silicone", color="Preto", unit_price=17.90, quantity=30, supplier="ImportCases", entry_date="2025-01-08"),
    dict(model="Redmi Note 13 Pro", brand="Xiaomi", type="Anti-impacto", color="Vermelho", unit_price=34.90, quantity=0, supplier="ProtectMax", entry_date="2025-01-08"),
    dict(model="Redmi Note 13", brand="Xiaomi", type="Transparente", color="Transparente", unit_price=11.90, quantity=4, supplier="ImportCases", entry_date="2025-01-06"),
    dict(model="Poco X6", brand="Xiaomi", type="Silicone", color="Amarelo", unit_price=16.90, quantity=20, supplier="CaseWholesale", entry_date="2024-12-18"),
    dict(model="Poco X6", brand="Xiaomi", type="Rígida", color="Preto", unit_price=21.90, quantity=1, supplier="CaseWholesale", entry_date="2024-12-18"),
    dict(model="Mi 14", brand="Xiaomi", type="Silicone", color="Branco", unit_price=24.90, quantity=0, supplier="ImportCases", entry_date="2025-01-02"),
    dict(model="Realme 12 Pro+", brand="Realme", type="Silicone", color="Preto", unit_price=16.90, quantity=15, supplier="ImportCases", entry_date="2025-01-03"),
    dict(model="Realme 12 Pro+", brand="Realme", type="Transparente", color="Transparente", unit_price=10.90, quantity=0, supplier="ImportCases", entry_date="2025-01-03"),
    dict(model="Realme C55", brand="Realme", type="Silicone", color="Rosa", unit_price=12.90, quantity=8, supplier="CaseWholesale", entry_date="2024-12-22"),
    dict(model="iPhone 15 Pro Max", brand="Apple", type="Anti-impacto", color="Verde", unit_price=42.90, quantity=0, supplier="ProtectMax", entry_date="2025-01-10"),
    dict(model="Galaxy S24 Ultra", brand="Samsung", type="Carteira", color="Marrom", unit_price=54.90, quantity=2, supplier="CaseWholesale", entry_date="2025-01-15"),
    dict(model="iPhone 15 Pro", brand="Apple", type="Rígida", color="Branco", unit_price=27.90, quantity=0, supplier="ImportCases", entry_date="2025-01-12"),
    dict(model="Galaxy S24", brand="Samsung", type="Silicone", color="Rosa", unit_price=24.90, quantity=5, supplier="ImportCases", entry_date="2025-01-14"),
    dict(model="Moto G84", brand="Motorola", type="Rígida", color="Azul", unit_price=19.90, quantity=0, supplier="CaseWholesale", entry_date="2025-01-05"),
    dict(model="Redmi Note 13 Pro", brand="Xiaomi", type="Carteira", color="Preto", unit_price=37.90, quantity=3, supplier="CaseWholesale", entry_date="2025-01-08"),
]
