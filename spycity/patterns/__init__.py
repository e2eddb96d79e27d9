"""Small facade, factory, observer and state examples built around the city's characters."""