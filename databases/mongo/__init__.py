from models.restaurant import Restaurant

MODELS = [Restaurant]
