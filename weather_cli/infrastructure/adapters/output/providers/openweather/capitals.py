"""Capitais por código ISO - fallback da busca por país do OpenWeatherMap"""

CAPITALS = {
    'ES': 'Madrid', 'US': 'Washington', 'MX': 'Mexico City', 'AR': 'Buenos Aires',
    'CO': 'Bogota', 'PE': 'Lima', 'CL': 'Santiago', 'VE': 'Caracas',
    'EC': 'Quito', 'BR': 'Brasilia', 'FR': 'Paris', 'DE': 'Berlin',
    'IT': 'Rome', 'GB': 'London', 'PT': 'Lisbon', 'JP': 'Tokyo',
    'CN': 'Beijing', 'IN': 'New Delhi', 'AU': 'Canberra', 'CA': 'Ottawa',
    'RU': 'Moscow', 'KR': 'Seoul', 'NL': 'Amsterdam', 'BE': 'Brussels',
    'CH': 'Bern', 'AT': 'Vienna', 'PL': 'Warsaw', 'SE': 'Stockholm',
    'NO': 'Oslo', 'DK': 'Copenhagen', 'FI': 'Helsinki', 'IE': 'Dublin',
    'GR': 'Athens', 'TR': 'Ankara', 'EG': 'Cairo', 'ZA': 'Pretoria',
    'NG': 'Abuja', 'KE': 'Nairobi', 'MA': 'Rabat', 'TH': 'Bangkok',
    'VN': 'Hanoi', 'PH': 'Manila', 'ID': 'Jakarta', 'MY': 'Kuala Lumpur',
    'SG': 'Singapore', 'NZ': 'Wellington', 'CU': 'Havana', 'CR': 'San Jose',
    'PA': 'Panama City', 'GT': 'Guatemala City', 'HN': 'Tegucigalpa', 'SV': 'San Salvador',
    'NI': 'Managua', 'DO': 'Santo Domingo', 'PR': 'San Juan', 'UY': 'Montevideo',
    'PY': 'Asuncion', 'BO': 'La Paz',
}
