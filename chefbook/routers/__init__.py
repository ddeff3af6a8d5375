from . import chefs, ingredients, recipes

routers = [chefs.router, ingredients.router, recipes.router]
