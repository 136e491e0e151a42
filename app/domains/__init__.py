# app/domains/__init__.py

"""비즈니스 도메인 패키지입니다. 각 하위 패키지는 models, schemas, crud, services, routers로 구성됩니다."""
